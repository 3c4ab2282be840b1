import panel as pn
import param
from panel.reactive import ReactiveHTML
from panel.viewable import Viewer

import adminDashboard.styling as styling
from adminDashboard import settings


class ScrollObserver(ReactiveHTML):
    '''
    invisible element that syncs window.scrollY back to python
    '''

    scroll_y = param.Number(default=0)

    _template = '<div id="observer" style="display: none;"></div>'

    _scripts = {
        'render': """
            state.on_scroll = () => { data.scroll_y = window.scrollY }
            window.addEventListener('scroll', state.on_scroll, {passive: true})
        """,
        'remove': "window.removeEventListener('scroll', state.on_scroll)",
    }


class Component(Viewer):
    '''
    page header, turns frosted once the page is scrolled
    '''

    scrolled = param.Boolean(default=False)

    def __init__(self, title='Admin Dashboard', **params):
        super().__init__(**params)
        self.observer = ScrollObserver(width=0, height=0, margin=0)
        self.brand = pn.pane.HTML(f"""
<div style="display: flex; align-items: center; gap: 8px; font-size: 1.1em;">
    <span style="{styling.css(styling.slot_badge)}">🛡️</span>
    <b>{title}</b>
</div>
""")
        self._layout = pn.Row(
            self.brand, self.observer,
            styles=styling.header_transparent,
            sizing_mode='stretch_width',
        )
        self.observer.param.watch(self._on_scroll, 'scroll_y')

    def _on_scroll(self, e):
        self.scrolled = e.new > settings.SCROLL_THRESHOLD

    @param.depends('scrolled', watch=True)
    def _update_style(self):
        self._layout.styles = styling.header_frosted if self.scrolled else styling.header_transparent

    def __panel__(self):
        return self._layout
