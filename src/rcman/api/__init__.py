# rcman API Layer
# Created: 2026-10-18
#
# Versioned REST endpoints for the desktop client, mounted at /api/v1/.
