"""Shared Kernel Application Layer"""
