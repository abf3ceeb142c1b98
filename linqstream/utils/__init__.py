"""Helpers shared by terminal operators"""
