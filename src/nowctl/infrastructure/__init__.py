"""Infrastructure layer — platform API access.

This layer depends on stdlib and third-party libs (httpx).
It must never import from domain, services, commands, or output.
The service layer turns API responses into ServiceResult values.
"""
