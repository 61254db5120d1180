from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from landing.database.session import Base

class Registration(Base):
    __tablename__ = "waitlist"
    # AUTOINCREMENT: los ids nunca se reutilizan
    __table_args__ = {"sqlite_autoincrement": True}
    
    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, nullable=False, index=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<Registration id={self.id} email={self.email!r}>"
