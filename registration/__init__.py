"""
User registration: input validation and the operations exposed over HTTP.
"""
