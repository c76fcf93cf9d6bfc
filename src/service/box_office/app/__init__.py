"""Box Office Application Layer"""
