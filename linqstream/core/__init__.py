"""Core query facade and shared types"""
