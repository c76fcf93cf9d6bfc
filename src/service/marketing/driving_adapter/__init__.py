"""Marketing Driving Adapters"""
