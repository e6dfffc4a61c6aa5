# API Route Constants

# Hotel routes
HOTEL_BASE = '/hotels'
HOTEL_LIST = HOTEL_BASE

# System routes
HEALTH = '/health'
METRICS = '/metrics'
