"""Marketing Response Schemas"""
