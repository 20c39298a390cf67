"""Configuration, logging and error handling"""
