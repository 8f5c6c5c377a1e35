"""MFA commands."""

from .create_mfa_method import CreateMfaMethodCommand, CreateMfaMethodCommandHandler
from .record_mfa_attempt import MfaAttemptResult, RecordMfaAttemptCommand, RecordMfaAttemptCommandHandler
from .toggle_mfa_method import ToggleMfaMethodCommand, ToggleMfaMethodCommandHandler
from .verify_backup_code import (
    BackupCodeVerificationResult,
    VerifyBackupCodeCommand,
    VerifyBackupCodeCommandHandler,
)

__all__ = [
    "BackupCodeVerificationResult",
    "CreateMfaMethodCommand",
    "CreateMfaMethodCommandHandler",
    "MfaAttemptResult",
    "RecordMfaAttemptCommand",
    "RecordMfaAttemptCommandHandler",
    "ToggleMfaMethodCommand",
    "ToggleMfaMethodCommandHandler",
    "VerifyBackupCodeCommand",
    "VerifyBackupCodeCommandHandler",
]
