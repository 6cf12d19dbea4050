from fastapi import APIRouter, Query

from runplan.faq.content import FAQEntry, find_faq_entries

router = APIRouter(prefix="/faq", tags=["faq"])


@router.get("", response_model=list[FAQEntry])
def list_faq(q: str = Query("", description="Optional text to filter entries by")) -> list[FAQEntry]:
    return find_faq_entries(q)
