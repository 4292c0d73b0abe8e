def time_zone(request):
    """Provide the time zone resolved for the current request in templates."""
    resolved = getattr(request, "time_zone", None)
    if resolved is None:
        return {}
    return {"resolved_time_zone": resolved}
