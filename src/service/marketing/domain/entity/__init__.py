"""Marketing Entities"""
