"""binstats HTTP API"""
