"""Marketing HTTP Controllers"""
