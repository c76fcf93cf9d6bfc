"""Box Office HTTP Controllers"""
