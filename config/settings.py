"""
Settings for the Adaptive Pay command line.
"""

# Application settings
APP_CONFIG = {
    'name': 'Adaptive Pay',
    'version': '1.0',
    'prog': 'adaptive-pay'
}

# Logging settings
LOGGING_CONFIG = {
    'level': 'WARNING',
    'verbose_level': 'DEBUG',
    'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
}
