"""Marketing DTOs - Application Layer"""
