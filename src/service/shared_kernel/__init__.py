"""Shared Kernel"""
