"""Integration tests for siren_client.

Tests drive the real aiohttp transport against a loopback MockSirenServer.
"""
