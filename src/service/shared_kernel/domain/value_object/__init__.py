"""Shared Kernel Value Objects"""
