"""Bounded Contexts"""
