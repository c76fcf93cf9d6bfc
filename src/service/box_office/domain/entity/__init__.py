"""Box Office Entities"""
