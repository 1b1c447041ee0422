"""
Modelos de base de datos (ORM).
"""
from sqlalchemy import Column, String, Integer, Date, DateTime, Text, JSON
from sqlalchemy.sql import func

from flightlog.infrastructure.database.session import Base


class FlightLogModel(Base):
    """
    Modelo de base de datos para vuelos del logbook.

    Coleccion versionada: al cambiar el formato se cambia el nombre de la
    tabla en lugar de migrar los datos (se repueblan con el siguiente sync).

    Estados de validacion:
    - NULL / pending: pendiente de validar
    - validated: validado por admin o instructor (cuenta en estadisticas)
    - rejected: rechazado, con feedback para el alumno
    """

    __tablename__ = "flight_logs_v2"

    id = Column(String(64), primary_key=True)
    date = Column(Date, nullable=False, index=True)
    student_name = Column(String(255), nullable=False, index=True)
    instructor_name = Column(String(255), nullable=False, default="")
    session = Column(String(50), nullable=False)
    flight_type = Column(String(20), nullable=False, default="Real")
    grade = Column(String(50), nullable=False, default="")
    total_time = Column(Integer, nullable=False, default=0)  # minutos
    approaches = Column(JSON, nullable=False, default=list)

    aircraft_registration = Column(String(50), nullable=False, default="")
    departure_place = Column(String(50), nullable=False, default="")
    arrival_place = Column(String(50), nullable=False, default="")
    procedures = Column(Text, nullable=False, default="")
    remarks = Column(Text, nullable=False, default="")

    validation_status = Column(String(20), nullable=True, index=True)
    student_feedback = Column(Text, nullable=True)
    validation_remarks = Column(Text, nullable=True)

    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<FlightLog(id={self.id}, student={self.student_name}, session={self.session})>"
