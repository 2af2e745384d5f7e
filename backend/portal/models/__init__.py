from .section import Section
from .section_content import SectionContent
from .user import User
from .user_role import UserRole
