# Package marker; importing it registers every table on Base.metadata
from app.models.user import User  # noqa
from app.models.course import Course  # noqa
from app.models.student import Student  # noqa
from app.models.pricing import PricingPlan  # noqa
from app.models.creator_plan import CreatorPlan  # noqa
from app.models.auth_session import AuthSession  # noqa
