"""Marketing Driven Adapters"""
