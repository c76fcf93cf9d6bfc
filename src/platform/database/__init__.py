"""Database Connectivity"""
