"""
handlers/ - Presentation Layer
================================
Telegram bot handlers. Each handler receives updates from Telegram,
turns them into dispatcher events, and sends the replies back to the user.
No business logic lives here.
"""
