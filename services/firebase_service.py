import json
import logging

import firebase_admin
from firebase_admin import credentials, auth, db

from core.config import settings

logger = logging.getLogger(__name__)


class EmailAlreadyInUse(ValueError):
    """Raised when signing up with an email that already has an account."""


def initialize_firebase():
    """Initializes the Firebase Admin SDK."""
    try:
        firebase_admin.get_app()
        return
    except ValueError:
        pass

    if not settings.FIREBASE_SERVICE_ACCOUNT_KEY_JSON:
        logger.warning("FIREBASE_SERVICE_ACCOUNT_KEY_JSON is not set; auth and storage will fail.")
        return

    try:
        # The service account key is expected to be a JSON string in the environment variable.
        service_account_info = json.loads(settings.FIREBASE_SERVICE_ACCOUNT_KEY_JSON)
        cred = credentials.Certificate(service_account_info)

        firebase_admin.initialize_app(cred, {
            'databaseURL': settings.FIREBASE_DATABASE_URL
        })
        logger.info("Firebase initialized successfully.")
    except (ValueError, TypeError) as e:
        # The app keeps running; requests that need Firebase will fail individually.
        logger.error(f"Error initializing Firebase: {e}")


def create_user_in_firebase(email, password, full_name):
    """Creates a user in Firebase Auth and stores details in Realtime DB."""
    try:
        user_record = auth.create_user(
            email=email,
            password=password,
            display_name=full_name,
            email_verified=False
        )
    except auth.EmailAlreadyExistsError:
        raise EmailAlreadyInUse("The email address is already in use by another account.")

    # New accounts start on the free plan
    user_data = {
        'email': user_record.email,
        'full_name': full_name,
        'plan': 'basic',
        'created_at': user_record.user_metadata.creation_timestamp
    }
    db.reference(f'users/{user_record.uid}').set(user_data)
    logger.info(f"Created user {user_record.uid}")

    return {
        "uid": user_record.uid,
        "email": user_record.email,
        "full_name": user_record.display_name,
        "plan": "basic"
    }


# Call initialization on module load.
initialize_firebase()
