"""Shared Kernel Driven Adapters"""
