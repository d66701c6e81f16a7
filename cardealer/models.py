from sqlalchemy import Column, Integer, Numeric, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()

class Vehicle(Base):
    __tablename__ = "vehicles"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    make = Column(String(50))
    model = Column(String(50))
    variant = Column(String(100))
    colour = Column(String(30))
    year = Column(Integer)
    mileage = Column(Integer)
    price = Column(Numeric(10, 2))

    def __repr__(self) -> str:
        return f"<Vehicle id={self.id} make={self.make!r} model={self.model!r}>"
