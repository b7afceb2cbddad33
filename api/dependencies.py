from slowapi import Limiter
from slowapi.util import get_remote_address

# Rate limiter - uses client IP address for identification
limiter = Limiter(key_func=get_remote_address)
