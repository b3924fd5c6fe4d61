# Read-only listings: messages, lab results, medication samples, medical records
from fastapi import APIRouter

from .crud import add_list_route
from ..db.models import LabResultRow, MedSampleRow, MedicalRecordRow, MessageRow
from ..resources import LAB_RESULTS, MED_SAMPLES, MESSAGES, RECORDS

messages_router = APIRouter(prefix="/messages", tags=["Messages"])
lab_results_router = APIRouter(prefix="/lab-results", tags=["Lab Results"])
med_samples_router = APIRouter(prefix="/med-samples", tags=["Medication Samples"])
records_router = APIRouter(prefix="/records", tags=["Medical Records"])

add_list_route(messages_router, MESSAGES, MessageRow)
add_list_route(lab_results_router, LAB_RESULTS, LabResultRow)
add_list_route(med_samples_router, MED_SAMPLES, MedSampleRow)
add_list_route(records_router, RECORDS, MedicalRecordRow)
