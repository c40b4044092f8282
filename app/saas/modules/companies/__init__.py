"""
Companies module.

Scope:
- JSON CRUD endpoints under /api/companies (list, create, update, delete)
- Browser page under /app/companies
- Client-side view-model (`view.CompaniesView`) over the HTTP client

Hard constraints:
- No organization scoping; companies are a flat table
- No server-side validation beyond the NOT NULL name column
- Every failure is reported with one generic message per operation
"""
