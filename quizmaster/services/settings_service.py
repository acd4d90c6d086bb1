# quizmaster/services/settings_service.py
import logging
from typing import Any, Dict

from pydantic import ValidationError
from sqlalchemy.orm import Session

from quizmaster.models.app_settings import AppSettings
from quizmaster.schemas import AppSettingsRecord

logger = logging.getLogger(__name__)

SETTINGS_ID = 1


def get_app_settings(db: Session) -> AppSettingsRecord:
    """Current settings, or the defaults when none are stored or the read fails"""
    try:
        row = db.query(AppSettings).filter(AppSettings.id == SETTINGS_ID).first()
    except Exception as e:
        logger.warning(f"⚠️ Could not read app settings, using defaults: {str(e)}")
        return AppSettingsRecord()

    if not row:
        return AppSettingsRecord()
    return AppSettingsRecord.model_validate(row)


def update_app_settings(db: Session, data: Dict[str, Any]) -> dict:
    """Merge the given fields into the settings record"""
    current = get_app_settings(db)
    merged = current.model_dump()
    merged.update({key: value for key, value in data.items() if value is not None and key in merged})

    try:
        updated = AppSettingsRecord(**merged)
    except ValidationError as e:
        messages = [error["msg"] for error in e.errors()]
        return {"success": False, "message": "; ".join(messages)}

    try:
        row = db.query(AppSettings).filter(AppSettings.id == SETTINGS_ID).first()
        if not row:
            row = AppSettings(id=SETTINGS_ID)
            db.add(row)

        for field, value in updated.model_dump().items():
            setattr(row, field, value)
        db.commit()

    except Exception as e:
        db.rollback()
        logger.error(f"❌ Error saving app settings: {str(e)}")
        return {"success": False, "message": f"Error saving settings: {str(e)}"}

    logger.info("✅ App settings updated")
    return {"success": True, "message": "Settings saved successfully", "settings": updated}
