"""Box Office Report Aggregates"""
