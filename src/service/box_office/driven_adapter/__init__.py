"""Box Office Driven Adapters"""
