"""Box Office Domain Layer"""
