from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from uniswap_dashboard.api.deps import get_factories, get_pool_dashboard
from uniswap_dashboard.ui.factories import Factories
from uniswap_dashboard.ui.pages import render_home, render_page
from uniswap_dashboard.ui.pool_dashboard import PoolDashboard

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def home():
    return HTMLResponse(render_home())


@router.get("/pool", response_class=HTMLResponse)
def pool_dashboard(component: PoolDashboard = Depends(get_pool_dashboard)):
    component.mount()
    return HTMLResponse(render_page(component.render()))


@router.get("/factories", response_class=HTMLResponse)
def factories(component: Factories = Depends(get_factories)):
    component.mount()
    return HTMLResponse(render_page(component.render()))
