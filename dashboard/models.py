from sqlalchemy import Column, Integer, String, DateTime, Text
from sqlalchemy.orm import declarative_base
from datetime import datetime
import json

Base = declarative_base()


class Dashboard(Base):
    """Saved dashboard; `data` holds the full dashboard JSON document"""
    __tablename__ = "dashboards"

    id = Column(Integer, primary_key=True, index=True)
    slug = Column(String, unique=True, nullable=False, index=True)
    title = Column(String, nullable=False)
    version = Column(Integer, nullable=False, default=0)
    data = Column(Text, nullable=False, default="{}")
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def get_data(self) -> dict:
        return json.loads(self.data or "{}")

    def set_data(self, document: dict):
        self.data = json.dumps(document)
