"""
auth — Account authentication module.

Provides:
  • Password hashing (bcrypt, configurable work factor)
  • Signed session tokens (HMAC-SHA256)
  • Signup / credential-check workflows and their error taxonomy
  • Signup / signin / signout / session API routes
"""
