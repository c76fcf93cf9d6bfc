"""Box Office Reporting"""
