"""
Resource contracts: table layout and write rules per resource
"""
