"""Marketing Row Mappers"""
