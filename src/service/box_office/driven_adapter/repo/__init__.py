"""Box Office Repositories"""
