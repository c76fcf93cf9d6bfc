"""Marketing Domain Layer"""
