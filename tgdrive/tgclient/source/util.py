MB = 1048576
KB = 1024
BLOCK_SIZE = 512 * KB
"""Largest `upload.getFile` request telethon issues"""
