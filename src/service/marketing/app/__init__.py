"""Marketing Application Layer"""
