"""
Invoice Record Store test suite
"""
