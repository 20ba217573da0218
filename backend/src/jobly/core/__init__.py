"""Core - configuration, logging, errors and storage access"""
