import json

from django import forms

from arvskifte.errors import CalculationError
from arvskifte.io_store import case_from_dict


class CaseForm(forms.Form):
    case = forms.CharField(
        label="Ärende (JSON)",
        widget=forms.Textarea(attrs={"rows": 20, "cols": 80}),
    )

    def clean_case(self):
        raw = self.cleaned_data["case"]
        try:
            data = json.loads(raw)
        except ValueError as exc:
            raise forms.ValidationError(f"Ogiltig JSON: {exc}", code="invalid_json")
        try:
            return case_from_dict(data)
        except CalculationError as exc:
            raise forms.ValidationError(str(exc), code="structural")
