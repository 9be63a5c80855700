"""User domain model: maps to the 'users' table."""

from sqlalchemy import Column, Integer, String, Float, DateTime

from billtracker.infrastructure.database import Base


class UserModel(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    phone = Column(String(20), unique=True, nullable=False, index=True)
    username = Column(String(50), nullable=False)
    password = Column(String(255), nullable=False)  # passlib hash, never plaintext
    role = Column(String(20), nullable=False, default="user")  # user, admin
    balance = Column(Float, nullable=False, default=0.0)
    created_at = Column(DateTime, nullable=False)

    def __repr__(self):
        return f"<User {self.phone} - {self.username}>"
