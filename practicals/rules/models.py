from pydantic import BaseModel


class ProjectRules(BaseModel):
    slug: str
    rules_version: str

class RangeRule(BaseModel):
    min: int
    max: int

class LogsRules(BaseModel):
    allowed_extensions: list[str]
    default_page_size: int

class UploadsRules(BaseModel):
    field_name: str
    filename_prefix: str
    max_upload_bytes: int
    allowlist_mime_types: list[str]
    allowlist_extensions: list[str]

class StudentsRules(BaseModel):
    default_page_size: int
    max_page_size: int
    name: RangeRule

class ContactRules(BaseModel):
    min_name_length: int
    min_message_length: int
    sender_display_name: str
    fallback_address: str

class PasswordHashingRules(BaseModel):
    algorithm: str
    min_length: int

class AccountsRules(BaseModel):
    password_hashing: PasswordHashingRules
    name: RangeRule
    minimum_age_years: int
    token_ttl_minutes: int

class RateLimitWindow(BaseModel):
    window_seconds: int
    max_attempts: int | None = None
    max_requests: int | None = None

class RateLimitRules(BaseModel):
    login: RateLimitWindow
    contact: RateLimitWindow

class OpsRules(BaseModel):
    data_dir_required: bool
    required_env: list[str]

class Rules(BaseModel):
    project: ProjectRules
    logs: LogsRules
    uploads: UploadsRules
    students: StudentsRules
    contact: ContactRules
    accounts: AccountsRules
    rate_limits: RateLimitRules
    ops: OpsRules
