"""
auth — Local-credential authentication module.

Provides:
  • Access / refresh JWT issuance & verification (two secrets)
  • Password and refresh-token hashing (bcrypt)
  • ``AuthService``: signup, login, logout, refresh-token rotation
  • Signup / login / logout / refresh API routes
"""
