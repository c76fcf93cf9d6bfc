"""Box Office Report Use Cases"""
