"""
Legacy ``/api/*`` routes kept for older admin pages.
"""
from fastapi import APIRouter, Depends, Query
from typing import List, Optional, Union
from sqlalchemy.orm import Session

from igloo.database import get_db
from igloo.schemas import TestDetail, TestSummary
from igloo.security import require_admin
from igloo.services import test_service

router = APIRouter(tags=["Compat"])


@router.get("/health")
async def api_health():
    return {"ok": True}


@router.get("/tests/{test_id}", response_model=TestDetail, dependencies=[Depends(require_admin)])
async def api_get_test(test_id: str, db: Session = Depends(get_db)):
    return test_service.get_test(db, test_id)


@router.get(
    "/tests",
    response_model=Union[TestDetail, List[TestSummary]],
    dependencies=[Depends(require_admin)],
)
async def api_list_tests(id: Optional[str] = Query(None), db: Session = Depends(get_db)):
    """One test when ``id`` is given, otherwise the admin listing"""
    if id:
        return TestDetail.model_validate(test_service.get_test(db, id))
    return [TestSummary.model_validate(t) for t in test_service.list_tests(db)]
