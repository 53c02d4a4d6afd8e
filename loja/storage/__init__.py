"""
Credential storage backends for Loja.
"""
