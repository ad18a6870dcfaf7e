#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Supabase client construction.
"""

import logging

from supabase import create_client, Client

# Initialize logger
logger = logging.getLogger(__name__)


def create_supabase(supabase_url: str, supabase_key: str) -> Client:
    """
    Create the Supabase client used for all database operations.

    The client is built once at startup and handed to the application; nothing in
    this module keeps a reference to it.
    """
    if not supabase_url or not supabase_key:
        logger.error("Supabase credentials not found. Please check your .env file.")
        raise ValueError("Missing Supabase credentials")

    try:
        client = create_client(supabase_url, supabase_key)
    except Exception as e:
        logger.error(f"Failed to initialize Supabase client: {str(e)}")
        raise

    logger.info("Supabase client initialized successfully")
    return client
