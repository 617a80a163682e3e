from django import forms

from pathway_connect.core.codec import split_comma_list

INTEREST_OPTIONS = [
    'Technology', 'Healthcare', 'Education', 'Business', 'Finance', 'Marketing',
    'Design', 'Engineering', 'Social Work', 'Research', 'Writing', 'Art',
]

SKILL_OPTIONS = [
    'Communication', 'Leadership', 'Problem Solving', 'Technical Skills',
    'Creativity', 'Analytics', 'Project Management', 'Teaching', 'Sales',
]

INDUSTRY_OPTIONS = [
    'Technology', 'Healthcare', 'Education', 'Finance', 'Marketing',
    'Government', 'Non-Profit', 'Consulting', 'Manufacturing', 'Retail',
]

WORK_STYLE_OPTIONS = ['Remote Work', 'Hybrid (Remote + Office)', 'Office-based', 'Flexible']

TIMEFRAME_OPTIONS = ['0-6 months', '6-12 months', '1-2 years', '2+ years']

PLAN_TYPE_OPTIONS = ['Short-term (1-2 years)', 'Long-term (3-5 years)', 'Comprehensive (Both)']


def _choices(options, blank=False):
    pairs = [(option, option) for option in options]
    return [("", "Select...")] + pairs if blank else pairs


class ChatForm(forms.Form):
    message = forms.CharField(
        max_length=4000,
        widget=forms.Textarea(attrs={'rows': 3, 'placeholder': 'Ask about careers, majors, or next steps...'}),
    )

    def clean_message(self):
        message = self.cleaned_data['message'].strip()
        if not message:
            raise forms.ValidationError('Please enter a message.')
        return message


class CareerPlanForm(forms.Form):
    interests = forms.MultipleChoiceField(
        choices=_choices(INTEREST_OPTIONS), required=False, widget=forms.CheckboxSelectMultiple,
    )
    custom_interests = forms.CharField(required=False, label='Other interests (comma separated)')
    skills = forms.MultipleChoiceField(
        choices=_choices(SKILL_OPTIONS), required=False, widget=forms.CheckboxSelectMultiple,
    )
    custom_skills = forms.CharField(required=False, label='Other skills (comma separated)')
    industry = forms.ChoiceField(choices=_choices(INDUSTRY_OPTIONS, blank=True), required=False)
    custom_industry = forms.CharField(required=False, label='Other industry')
    work_style = forms.ChoiceField(choices=_choices(WORK_STYLE_OPTIONS, blank=True), required=False)
    timeframe = forms.ChoiceField(choices=_choices(TIMEFRAME_OPTIONS, blank=True), required=False)
    plan_type = forms.ChoiceField(choices=_choices(PLAN_TYPE_OPTIONS, blank=True), required=False)
    goals = forms.CharField(widget=forms.Textarea(attrs={'rows': 3}), required=False)

    def clean(self):
        cleaned_data = super().clean()

        interests = list(cleaned_data.get('interests') or [])
        for item in split_comma_list(cleaned_data.get('custom_interests')):
            if item not in interests:
                interests.append(item)
        skills = list(cleaned_data.get('skills') or [])
        for item in split_comma_list(cleaned_data.get('custom_skills')):
            if item not in skills:
                skills.append(item)

        cleaned_data['interests'] = interests
        cleaned_data['skills'] = skills
        cleaned_data['industry'] = (cleaned_data.get('custom_industry') or '').strip() or cleaned_data.get('industry')
        cleaned_data['goals'] = (cleaned_data.get('goals') or '').strip()

        if not interests or not skills or not cleaned_data['industry'] or not cleaned_data['goals']:
            raise forms.ValidationError(
                'Please fill in your interests, skills, industry, and goals before generating a plan.'
            )
        return cleaned_data

    def preferences(self):
        data = self.cleaned_data
        return {
            'interests': data['interests'],
            'skills': data['skills'],
            'industry': data['industry'],
            'work_style': data.get('work_style') or '',
            'timeframe': data.get('timeframe') or '',
            'goals': data['goals'],
            'plan_type': data.get('plan_type') or '',
        }


class PlanTextForm(forms.Form):
    plan = forms.CharField(widget=forms.Textarea(attrs={'hidden': True}), strip=False)

    def clean_plan(self):
        plan = self.cleaned_data['plan']
        if not plan.strip():
            raise forms.ValidationError('There is no career plan to use.')
        return plan

