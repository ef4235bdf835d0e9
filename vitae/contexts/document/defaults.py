"""
Default values for the VITAE résumé record.

Provides the fixed storage layout used by record_store.py, which reads and
writes both keys.
"""

# Durable storage keys
DATA_KEY = "resume_builder_data"
SECTOR_KEY = "resume_builder_sector"

# Version of the persisted JSON layout written by this build
SCHEMA_VERSION = 1
