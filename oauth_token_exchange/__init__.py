"""OAuth 2.0 token response validation and RFC 8693 token exchange"""
