from django.contrib import messages
from django.contrib.auth.mixins import LoginRequiredMixin
from django.shortcuts import render
from django.utils import timezone
from django.utils.translation import gettext_lazy as _
from django.views import View

from apps.timezones.resolver import TimeZoneResolver

from .forms import UserChangeForm


class ProfileView(LoginRequiredMixin, View):
    template_name = "users/profile.html"
    # Prefixed so the form's time zone field is not taken as the request parameter.
    form_prefix = "profile"

    def get(self, request):
        form = UserChangeForm(instance=request.user, prefix=self.form_prefix)
        return render(request, self.template_name, self._context(request, form))

    def post(self, request):
        form = UserChangeForm(request.POST, instance=request.user, prefix=self.form_prefix)
        if form.is_valid():
            form.save()

            resolver = TimeZoneResolver.from_settings()
            resolver.forget_session_choice(request)
            resolver.refresh(request)

            messages.success(request, _("Your profile was successfully saved."))

        return render(request, self.template_name, self._context(request, form))

    def _context(self, request, form):
        return {
            "form": form,
            "page_title": _("Profile"),
            "now": timezone.now(),
            "current_tz": timezone.get_current_timezone(),
        }
