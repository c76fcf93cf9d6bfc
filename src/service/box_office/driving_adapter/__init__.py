"""Box Office Driving Adapters"""
