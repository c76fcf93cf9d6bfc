"""Marketing Use Cases"""
