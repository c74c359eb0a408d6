"""Data models for the public API, stored rows and cached verification records."""