# clinic_dashboard/db/seed.py
# Demo fixtures for a fresh database; appointments are placed relative to today
from datetime import date, datetime, time, timedelta
import logging

from sqlmodel import Session, select

from .models import (
    AppointmentRow,
    DoctorRow,
    EncounterRow,
    LabResultRow,
    MedSampleRow,
    MedicalRecordRow,
    MessageRow,
    PatientRow,
    PrescriptionRow,
    RoomRow,
    StaffRow,
)
from ..schemas.doctors.doctor import default_availability

logger = logging.getLogger(__name__)


def _patients():
    return [
        PatientRow(
            name="John Doe", dob=date(1979, 4, 12), sex="male", status="active",
            contact={"phone": "+1 (555) 101-2020", "email": "john.doe@example.com", "address": "12 Elm Street"},
            emergency_contact={"name": "Mary Doe", "phone": "+1 (555) 101-2021", "relationship": "Spouse"},
            insurance={"provider": "BlueShield", "policy_number": "BS-100231", "group_number": "G-7781"},
            allergies=["Penicillin"], medical_history="Hypertension", last_visit=date(2024, 1, 15),
        ),
        PatientRow(
            name="Jane Smith", dob=date(1986, 9, 3), sex="female", status="active",
            contact={"phone": "+1 (555) 202-3030", "email": "jane.smith@example.com", "address": "48 Oak Avenue"},
            emergency_contact={"name": "Tom Smith", "phone": "+1 (555) 202-3031", "relationship": "Brother"},
            insurance={"provider": "Aetna", "policy_number": "AE-552190", "group_number": None},
            allergies=[], medical_history="Type 2 diabetes", last_visit=date(2024, 1, 12),
        ),
        PatientRow(
            name="Michael Johnson", dob=date(1968, 1, 27), sex="male", status="active",
            contact={"phone": "+1 (555) 303-4040", "email": "m.johnson@example.com", "address": "7 Pine Road"},
            allergies=["Sulfa drugs", "Latex"], medical_history="High cholesterol", last_visit=date(2024, 1, 10),
        ),
        PatientRow(
            name="Sarah Wilson", dob=date(1992, 6, 18), sex="female", status="pending",
            contact={"phone": "+1 (555) 404-5050", "email": "sarah.wilson@example.com"},
            allergies=[], medical_history="Migraines",
        ),
        PatientRow(
            name="Robert Brown", dob=date(1955, 11, 2), sex="male", status="inactive",
            contact={"phone": "+1 (555) 505-6060", "email": "robert.brown@example.com"},
            allergies=["Aspirin"], medical_history="Coronary artery disease",
        ),
    ]


def _doctors():
    return [
        DoctorRow(
            name="Dr. Sarah Johnson", email="sarah.johnson@clinic.com", phone="+1 (555) 123-4567",
            specialization="Cardiology", license_number="MD-100234", status="Active",
            consultation_fee=150.0, availability=default_availability(), experience="15 years", rating=4.8,
        ),
        DoctorRow(
            name="Dr. Michael Brown", email="michael.brown@clinic.com", phone="+1 (555) 345-6789",
            specialization="Pediatrics", license_number="MD-100871", status="Active",
            consultation_fee=120.0, availability=default_availability(), experience="9 years", rating=4.6,
        ),
        DoctorRow(
            name="Dr. Jennifer Lee", email="jennifer.lee@clinic.com", phone="+1 (555) 567-8901",
            specialization="Dermatology", license_number="MD-101552", status="On Leave",
            consultation_fee=130.0, availability=default_availability(), experience="7 years", rating=4.7,
        ),
        DoctorRow(
            name="Dr. James Wilson", email="james.wilson@clinic.com", phone="+1 (555) 789-0123",
            specialization="General Practice", license_number="MD-102009", status="Active",
            consultation_fee=90.0, availability=default_availability(), experience="20 years", rating=4.5,
        ),
    ]


def _rooms():
    return [
        RoomRow(name="Room 101", type="Consultation", capacity=1, status="Available",
                equipment=["Examination Table", "Computer", "Printer"], doctor="Dr. Sarah Johnson"),
        RoomRow(name="Room 102", type="Examination", capacity=2, status="Occupied",
                equipment=["Examination Table", "Medical Equipment", "Computer"], doctor="Dr. Michael Brown"),
        RoomRow(name="Room 103", type="Procedure", capacity=1, status="Maintenance",
                equipment=["Surgical Table", "Anesthesia Machine", "Monitor"], doctor="Dr. Emily Davis"),
        RoomRow(name="Room 104", type="Consultation", capacity=1, status="Available",
                equipment=["Examination Table", "Computer"], doctor="Dr. James Wilson"),
    ]


def _staff():
    return [
        StaffRow(name="Dr. Sarah Johnson", email="sarah.johnson@clinic.com", phone="+1 (555) 123-4567",
                 role="Doctor", department="Cardiology", status="Active", join_date=date(2023, 1, 15)),
        StaffRow(name="Emily Chen", email="emily.chen@clinic.com", phone="+1 (555) 234-5678",
                 role="Receptionist", department="Front Desk", status="Active", join_date=date(2023, 3, 20)),
        StaffRow(name="Dr. Michael Brown", email="michael.brown@clinic.com", phone="+1 (555) 345-6789",
                 role="Doctor", department="Pediatrics", status="Active", join_date=date(2022, 11, 10)),
        StaffRow(name="Lisa Rodriguez", email="lisa.rodriguez@clinic.com", phone="+1 (555) 456-7890",
                 role="Nurse", department="Emergency", status="On Leave", join_date=date(2023, 2, 5)),
        StaffRow(name="Dr. Jennifer Lee", email="jennifer.lee@clinic.com", phone="+1 (555) 567-8901",
                 role="Doctor", department="Dermatology", status="Active", join_date=date(2023, 4, 12)),
        StaffRow(name="Robert Wilson", email="robert.wilson@clinic.com", phone="+1 (555) 678-9012",
                 role="Administrator", department="Administration", status="Active", join_date=date(2022, 8, 15)),
    ]


def _appointments(patients, doctors, rooms, today: date):
    def at(day_offset: int, hour: int, minute: int = 0) -> datetime:
        return datetime.combine(today + timedelta(days=day_offset), time(hour, minute))

    plan = [
        # patient, doctor, room, start, minutes, type, status, priority, reason
        (0, 0, 0, at(0, 9), 30, "consultation", "confirmed", "normal", "Blood pressure review"),
        (1, 3, 3, at(0, 10, 30), 45, "follow-up", "scheduled", "normal", "Diabetes follow-up"),
        (2, 0, 1, at(0, 14), 30, "lab-test", "checked-in", "high", "Lipid panel discussion"),
        (3, 1, None, at(1, 11), 60, "routine", "scheduled", "low", "Annual check-up"),
        (4, 0, 2, at(-1, 15), 30, "emergency", "completed", "urgent", "Chest pain"),
        (0, 3, 3, at(-7, 9, 30), 30, "consultation", "no-show", "normal", "Medication question"),
    ]
    rows = []
    for p, d, r, start, minutes, type_, status, priority, reason in plan:
        rows.append(AppointmentRow(
            patient_id=patients[p].id,
            doctor_id=doctors[d].id,
            room_id=rooms[r].id if r is not None else None,
            start_at=start,
            duration=minutes,
            end_at=start + timedelta(minutes=minutes),
            type=type_,
            status=status,
            priority=priority,
            reason=reason,
        ))
    return rows


def _messages(patients):
    john, jane, michael, sarah, robert = patients
    return [
        MessageRow(patient_id=john.id, patient_name=john.name, subject="Medication Question",
                   content="I have a question about my blood pressure medication. I've been experiencing some dizziness in the morning.",
                   type="email", status="unread", priority="normal", sent_at=datetime(2024, 1, 20, 9, 30)),
        MessageRow(patient_id=jane.id, patient_name=jane.name, subject="Appointment Reschedule Request",
                   content="I need to reschedule my appointment for next week. Could it move to Friday afternoon?",
                   type="sms", status="read", priority="low", sent_at=datetime(2024, 1, 19, 14, 15), is_starred=True),
        MessageRow(patient_id=michael.id, patient_name=michael.name, subject="Urgent: Lab Results",
                   content="I received my lab results and I'm concerned about the cholesterol levels.",
                   type="in-app", status="unread", priority="high", sent_at=datetime(2024, 1, 19, 16, 45), attachments=2),
        MessageRow(patient_id=sarah.id, patient_name=sarah.name, subject="Follow-up on Treatment",
                   content="I've been following the migraine medication schedule and the frequency has reduced significantly.",
                   type="email", status="replied", priority="normal", sent_at=datetime(2024, 1, 18, 11, 20), attachments=1),
        MessageRow(patient_id=robert.id, patient_name=robert.name, subject="Emergency: Severe Chest Pain",
                   content="I'm experiencing severe chest pain and shortness of breath. Should I go to the emergency room?",
                   type="phone", status="unread", priority="urgent", sent_at=datetime(2024, 1, 20, 8, 15)),
    ]


def _lab_results(patients):
    john, jane, michael, sarah, _ = patients
    return [
        LabResultRow(
            patient_id=john.id, patient_name=john.name, test_name="Complete Blood Count (CBC)", test_type="blood",
            ordered_by="Dr. Sarah Johnson", date=date(2024, 1, 15), status="completed", attachments=2,
            notes="All values within normal range. No abnormalities detected.",
            results=[
                {"parameter": "Hemoglobin", "value": "14.2", "unit": "g/dL", "reference_range": "13.8-17.2", "status": "normal"},
                {"parameter": "White Blood Cells", "value": "8.5", "unit": "K/uL", "reference_range": "4.5-11.0", "status": "normal"},
                {"parameter": "Platelets", "value": "350", "unit": "K/uL", "reference_range": "150-450", "status": "normal"},
            ],
        ),
        LabResultRow(
            patient_id=jane.id, patient_name=jane.name, test_name="HbA1c (Diabetes Monitoring)", test_type="blood",
            ordered_by="Dr. James Wilson", date=date(2024, 1, 12), status="abnormal", attachments=1,
            notes="Elevated HbA1c indicates poor glycemic control. Recommend medication adjustment.",
            results=[
                {"parameter": "HbA1c", "value": "8.2", "unit": "%", "reference_range": "<7.0", "status": "high"},
                {"parameter": "Fasting Glucose", "value": "145", "unit": "mg/dL", "reference_range": "70-100", "status": "high"},
            ],
        ),
        LabResultRow(
            patient_id=michael.id, patient_name=michael.name, test_name="Lipid Panel", test_type="blood",
            ordered_by="Dr. Sarah Johnson", date=date(2024, 1, 10), status="completed", attachments=3,
            notes="Elevated cholesterol levels. Consider statin therapy.",
            results=[
                {"parameter": "Total Cholesterol", "value": "220", "unit": "mg/dL", "reference_range": "<200", "status": "high"},
                {"parameter": "LDL Cholesterol", "value": "140", "unit": "mg/dL", "reference_range": "<100", "status": "high"},
                {"parameter": "HDL Cholesterol", "value": "45", "unit": "mg/dL", "reference_range": ">40", "status": "normal"},
            ],
        ),
        LabResultRow(
            patient_id=sarah.id, patient_name=sarah.name, test_name="Urinalysis", test_type="urine",
            ordered_by="Dr. Michael Brown", date=date(2024, 1, 8), status="pending",
            notes="Test in progress. Results expected within 24 hours.",
        ),
    ]


def _med_samples(today: date):
    return [
        MedSampleRow(medication_name="Lisinopril 10mg", manufacturer="PharmaCorp Inc.", representative="John Smith",
                     representative_email="john.smith@pharmacorp.com", sample_type="tablet", quantity=30,
                     expiry_date=today + timedelta(days=20), received_date=today - timedelta(days=60), status="available",
                     description="ACE inhibitor for hypertension management", dosage="10mg once daily"),
        MedSampleRow(medication_name="Metformin 500mg", manufacturer="MediLife Pharmaceuticals", representative="Sarah Johnson",
                     representative_email="sarah.j@medilife.com", sample_type="tablet", quantity=60,
                     expiry_date=today + timedelta(days=365), received_date=today - timedelta(days=45), status="available",
                     description="First-line treatment for Type 2 Diabetes", dosage="500mg twice daily with meals", is_starred=True),
        MedSampleRow(medication_name="Atorvastatin 20mg", manufacturer="CardioMed Solutions", representative="Michael Brown",
                     representative_email="michael.b@cardiomed.com", sample_type="tablet", quantity=28,
                     expiry_date=today + timedelta(days=120), received_date=today - timedelta(days=30), status="distributed",
                     description="HMG-CoA reductase inhibitor for cholesterol management", dosage="20mg once daily in the evening"),
        MedSampleRow(medication_name="Sumatriptan 50mg", manufacturer="NeuroPharm Ltd.", representative="Emily Davis",
                     representative_email="emily.d@neuropharm.com", sample_type="tablet", quantity=9,
                     expiry_date=today - timedelta(days=10), received_date=today - timedelta(days=200), status="expired",
                     description="Triptan for acute migraine treatment", dosage="50mg at onset of migraine, max 2 doses per day"),
    ]


def _records(patients):
    john, jane, michael, sarah, _ = patients
    return [
        MedicalRecordRow(patient_id=john.id, patient_name=john.name, record_type="consultation",
                         title="Hypertension Management Consultation", date=date(2024, 1, 15), doctor="Dr. Sarah Johnson",
                         status="completed", attachments=3, tags=["Hypertension", "Blood Pressure", "Medication Review"],
                         summary="Patient presented with elevated blood pressure readings. Discussed lifestyle modifications."),
        MedicalRecordRow(patient_id=jane.id, patient_name=jane.name, record_type="diagnosis",
                         title="Diabetes Type 2 Diagnosis", date=date(2024, 1, 12), doctor="Dr. James Wilson",
                         status="reviewed", attachments=5, tags=["Diabetes", "HbA1c", "Glucose Test"],
                         summary="Confirmed diagnosis of Type 2 Diabetes based on HbA1c levels and glucose tolerance test."),
        MedicalRecordRow(patient_id=michael.id, patient_name=michael.name, record_type="treatment",
                         title="Cholesterol Management Plan", date=date(2024, 1, 10), doctor="Dr. Sarah Johnson",
                         status="completed", attachments=2, tags=["Cholesterol", "Statin", "Dietary Counseling"],
                         summary="Initiated statin therapy and dietary counseling for elevated cholesterol levels."),
        MedicalRecordRow(patient_id=sarah.id, patient_name=sarah.name, record_type="lab-result",
                         title="Complete Blood Count Results", date=date(2024, 1, 8), doctor="Dr. Michael Brown",
                         status="draft", attachments=1, tags=["CBC", "Blood Test", "WBC"],
                         summary="CBC results show normal ranges with slight elevation in white blood cell count."),
        MedicalRecordRow(patient_id=john.id, patient_name=john.name, record_type="prescription",
                         title="Blood Pressure Medication Prescription", date=date(2024, 1, 15), doctor="Dr. Sarah Johnson",
                         status="completed", attachments=1, tags=["Prescription", "Lisinopril", "Hypertension"],
                         summary="Prescribed Lisinopril 10mg daily for hypertension management."),
    ]


def _history(patients):
    john, jane = patients[0], patients[1]
    encounters = [
        EncounterRow(patient_id=john.id, encounter_number="ENC-0001", visit_type="consultation",
                     reason_for_visit="Elevated blood pressure", status="completed", created_at=datetime(2024, 1, 15, 9, 0)),
        EncounterRow(patient_id=jane.id, encounter_number="ENC-0002", visit_type="follow-up",
                     reason_for_visit="Glucose control review", status="completed", created_at=datetime(2024, 1, 12, 10, 30)),
    ]
    prescriptions = [
        PrescriptionRow(patient_id=john.id, prescription_number="RX-0001", status="active",
                        diagnosis="Essential hypertension", issued_at=datetime(2024, 1, 15, 9, 40)),
        PrescriptionRow(patient_id=jane.id, prescription_number="RX-0002", status="active",
                        diagnosis="Type 2 diabetes mellitus", issued_at=datetime(2024, 1, 12, 11, 0)),
    ]
    return encounters + prescriptions


def seed_if_empty(session: Session, today: date = None) -> bool:
    """Load the demo fixtures unless patients already exist; returns True when seeded"""
    if session.exec(select(PatientRow)).first() is not None:
        logger.info("Database already populated, skipping seed")
        return False

    today = today or date.today()
    patients, doctors, rooms = _patients(), _doctors(), _rooms()
    session.add_all(patients + doctors + rooms + _staff() + _med_samples(today))
    session.flush()  # assigns ids used by the dependent rows below

    session.add_all(_appointments(patients, doctors, rooms, today))
    session.add_all(_messages(patients) + _lab_results(patients) + _records(patients) + _history(patients))
    session.commit()
    logger.info(f"Seeded {len(patients)} patients, {len(doctors)} doctors and {len(rooms)} rooms")
    return True
