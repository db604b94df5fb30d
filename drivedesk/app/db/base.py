from drivedesk.app.db.base_class import Base

# Import models to register metadata for Base.metadata.create_all
from drivedesk.app.models.lesson import Lesson  # noqa: F401
from drivedesk.app.models.feedback import Feedback  # noqa: F401
from drivedesk.app.models.invoice import Invoice  # noqa: F401
