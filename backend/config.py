import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Comma separated list of browser origins allowed to call the API
    CORS_ORIGINS = [
        o.strip() for o in os.environ.get(
            'CORS_ORIGINS',
            'http://localhost:5173,http://127.0.0.1:5173,http://localhost:5174,http://127.0.0.1:5174',
        ).split(',') if o.strip()
    ]
    # Number of completed games kept and returned by the history endpoint (at most 10)
    HISTORY_LIMIT = int(os.environ.get('HISTORY_LIMIT', '10'))
    # Optional: seed the dice for reproducible sessions. Unset uses SystemRandom.
    RANDOM_SEED = int(os.environ['RANDOM_SEED']) if os.environ.get('RANDOM_SEED') else None
    # Client side (`flask play`)
    DICE_API_URL = os.environ.get('DICE_API_URL', 'http://localhost:5000')
    CLIENT_TIMEOUT_SEC = float(os.environ.get('CLIENT_TIMEOUT_SEC', '5'))
    # Cosmetic pause between receiving a roll and showing it (seconds)
    ROLL_DISPLAY_DELAY_SEC = float(os.environ.get('ROLL_DISPLAY_DELAY_SEC', '1.0'))
