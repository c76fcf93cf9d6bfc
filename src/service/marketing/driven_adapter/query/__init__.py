"""Marketing Query Builders"""
