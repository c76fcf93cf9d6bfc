"""Platform: configuration, logging, database and error plumbing"""
