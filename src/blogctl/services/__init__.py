"""Service layer — check and scaffold operations returning ServiceResult."""
