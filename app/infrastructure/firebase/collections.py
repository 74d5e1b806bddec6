"""Firestore collection names (schema-in-code).

Firestore has no DDL or migrations. Collections are created automatically
when you first write a document. Use these constants so collection names
stay consistent with the documents already written by the web frontend.

Example:
    db = request.app.state.firestore
    await db.collection(COLLECTION_UNIVERSITIES).document(university_id).get()
"""

COLLECTION_USERS = "users"
# Sub-collection under users/{uid}; also queried as a collection group.
COLLECTION_APPLICATIONS = "applications"
COLLECTION_UNIVERSITIES = "universities"

# Grant records: document ID is the identity uid, existence is the grant.
COLLECTION_ROLES_ADMIN = "roles_admin"
COLLECTION_ROLES_UNIVERSITY = "roles_university"

# Public lead capture
COLLECTION_REGISTRATIONS = "registrations"
COLLECTION_NEWSLETTER_SUBSCRIPTIONS = "newsletter_subscriptions"
