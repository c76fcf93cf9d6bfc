"""Box Office Row Mappers"""
