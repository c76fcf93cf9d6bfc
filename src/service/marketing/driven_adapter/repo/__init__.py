"""Marketing Repositories"""
