"""Constants"""
