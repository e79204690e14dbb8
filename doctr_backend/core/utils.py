import logging

audit_logger = logging.getLogger('doctr_backend.audit')
logger = logging.getLogger(__name__)


def log_doctor_action(user, action, doctor_id=None, meta=None):
    """Write a doctor registry action to the audit log.

    Failures are logged and swallowed; auditing never breaks a request.
    """

    username = ''
    if getattr(user, 'is_authenticated', False):
        username = getattr(user, 'username', '') or ''

    try:
        audit_logger.info(
            'action=%s user=%s doctor_id=%s meta=%s',
            action,
            username or '-',
            doctor_id if doctor_id is not None else '-',
            meta or {},
        )
    except Exception:
        logger.exception('Audit log write failed (action=%s, doctor_id=%s)', action, doctor_id)
