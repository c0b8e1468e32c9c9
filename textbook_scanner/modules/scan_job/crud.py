"""CRUD operations for scan job entities using FastCRUD."""

from fastcrud import FastCRUD

from .models import ScanJob

scan_job_crud: FastCRUD = FastCRUD(ScanJob)
