from django import forms
from .content import pain_point_choices


class WaitlistForm(forms.Form):
    """
    Waitlist signup posted by browsers without JavaScript.

    Mirrors the JSON API payload; with JavaScript enabled the page posts to
    /api/waitlist instead.
    """

    email = forms.EmailField(
        max_length=254,
        widget=forms.EmailInput(attrs={
            'class': 'input',
            'placeholder': 'your@email.com',
        }),
        error_messages={'invalid': 'Please enter a valid email address'},
    )

    feedback = forms.CharField(
        required=False,
        strip=False,
        widget=forms.Textarea(attrs={
            'class': 'textarea',
            'rows': 5,
            'placeholder': (
                'Tell us about your course creation challenges, feature requests, '
                'or what would make this platform perfect for you...'
            ),
        }),
    )

    pain_points = forms.MultipleChoiceField(
        required=False,
        choices=pain_point_choices,
        widget=forms.CheckboxSelectMultiple,
        error_messages={
            'invalid_choice': '"%(value)s" is no longer one of the listed challenges. Please reselect and try again.',
        },
    )
