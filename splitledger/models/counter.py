from sqlalchemy import Column, Integer, String
from splitledger.db.session import Base

class Counter(Base):
    __tablename__ = "counters"

    model = Column(String, primary_key=True)
    count = Column(Integer, nullable=False, default=0)
