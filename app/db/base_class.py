# /ministry-dashboard-backend/app/db/base_class.py

from sqlalchemy.orm import declarative_base, declared_attr


class _TableNameMixin:
    """Derives a plural, lower-case table name from the model class name."""

    @declared_attr
    def __tablename__(cls) -> str:
        return f"{cls.__name__.lower()}s"


# Every ORM model in the application inherits from this Base.
Base = declarative_base(cls=_TableNameMixin)
