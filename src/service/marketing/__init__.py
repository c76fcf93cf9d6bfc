"""Marketing Queries"""
