"""Box Office Response Schemas"""
