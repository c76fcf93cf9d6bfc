"""Logging"""
