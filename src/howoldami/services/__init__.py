"""Service layer: age calculation behind the ServiceResult contract."""
