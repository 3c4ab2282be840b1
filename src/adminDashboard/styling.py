unlocked_border = {'border': '1px solid rgba(34, 197, 94, 0.3)'}
locked_border = {'border': '1px solid rgba(239, 68, 68, 0.3)'}

unlocked_badge = dict(
    background='rgba(34, 197, 94, 0.2)',
    color='#16a34a',
    padding='2px 8px',
    border_radius='6px',
)
locked_badge = dict(
    background='#ef4444',
    color='white',
    padding='2px 8px',
    border_radius='6px',
)
slot_badge = dict(
    background='rgba(30, 144, 255, 0.1)',
    padding='2px 8px',
    border_radius='6px',
)

field_box = dict(
    background='rgba(255, 255, 255, 0.6)',
    padding='8px',
    border_radius='6px',
    margin='4px 0',
)

header_base = {
    'position': 'sticky',
    'top': '0',
    'z-index': '50',
    'width': '100%',
    'padding': '12px 16px',
    'transition': 'all 300ms',
}
header_transparent = dict(header_base, background='transparent')
# glass morphism
header_frosted = dict(
    header_base,
    **{
        'background': 'rgba(255, 255, 255, 0.7)',
        'backdrop-filter': 'blur(12px)',
        'border-bottom': '1px solid rgba(255, 255, 255, 0.1)',
        'box-shadow': '0 4px 12px rgba(0, 0, 0, 0.05)',
    }
)


def css(style: dict) -> str:
    '''inline css from a style dict, underscores become dashes'''
    return '; '.join(f"{key.replace('_', '-')}: {value}"
                     for key, value in style.items())
