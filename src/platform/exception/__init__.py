"""Exceptions"""
