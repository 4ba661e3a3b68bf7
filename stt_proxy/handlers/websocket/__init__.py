from .manager import handle_live_transcription

__all__ = ["handle_live_transcription"]
