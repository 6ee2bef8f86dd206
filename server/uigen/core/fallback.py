# uigen/core/fallback.py
"""
Static GeneratedUI component served whenever the model path is unavailable.
The same text is returned regardless of the requested app idea.
"""

FALLBACK_TEMPLATE = r"""'use client'

import React from 'react'
import { Button } from '@/components/ui/button'
import { Card, CardContent, CardDescription, CardHeader, CardTitle } from '@/components/ui/card'
import { Badge } from '@/components/ui/badge'
import { ArrowRight, Calculator, TrendingUp, Shield, Users } from 'lucide-react'
import { useFuyouStore } from '@/store/fuyouStore'

const FEATURES = [
  {
    icon: Calculator,
    accent: 'blue',
    title: 'Automatic calculation',
    description: 'Derives the optimal deduction from income and dependents',
    points: ['Real-time updates', 'Current tax rules', 'History tracking'],
  },
  {
    icon: Shield,
    accent: 'green',
    title: 'Data protection',
    description: 'Personal data is stored and processed securely',
    points: ['Encrypted storage', 'GDPR ready', 'Audit log'],
  },
  {
    icon: TrendingUp,
    accent: 'purple',
    title: 'Optimization tips',
    description: 'Suggestions that maximize your tax savings',
    points: ['AI analysis', 'Optimization plans', 'Simulations'],
  },
]

/**
 * Generated UI - dependent deduction calculator
 * Fallback scaffold produced without a model response.
 */
export default function GeneratedUI() {
  // ===== Store =====
  const {
    income,
    remainingLimit,
    dependentCount,
    updateIncome,
    addDependent,
    calculateRemaining,
  } = useFuyouStore()

  // ===== Event Handlers =====
  const handleIncomeUpdate = () => {
    console.log('[Generated UI] Income update triggered')
    updateIncome(income + 100000)
    calculateRemaining()
    console.log(`Updated income: ${income.toLocaleString()}`)
    console.log(`Remaining limit: ${remainingLimit.toLocaleString()}`)
  }

  const handleDependentAdd = () => {
    console.log('[Generated UI] Adding dependent')
    addDependent()
    calculateRemaining()
    console.log(`Dependents: ${dependentCount}`)
  }

  const handleCalculate = async () => {
    console.log('[Generated UI] Starting calculation...')
    try {
      const response = await fetch('/api/fuyouCheck', {
        method: 'POST',
        headers: { 'Content-Type': 'application/json' },
        body: JSON.stringify({ income, dependentCount }),
      })

      if (response.ok) {
        const result = await response.json()
        console.log('[Generated UI] API call successful:', result)
        updateIncome(result.adjustedIncome || income)
      }
    } catch (error) {
      console.warn('[Generated UI] API call failed:', error)
    }
  }

  return (
    <div className="min-h-screen bg-gradient-to-br from-blue-50 to-indigo-100">
      {/* Hero Section */}
      <section className="relative overflow-hidden bg-white">
        <div className="container mx-auto px-6 py-20">
          <div className="text-center space-y-8">
            <Badge className="bg-blue-100 text-blue-800 border-blue-200 px-4 py-2">
              <Calculator className="w-4 h-4 mr-2" />
              AI powered
            </Badge>

            <h1 className="text-5xl md:text-6xl font-bold text-gray-900 leading-tight">
              <span className="text-blue-600">Dependent deduction</span>
              <br />
              <span className="text-gray-800">calculator</span>
            </h1>

            <p className="text-xl md:text-2xl text-gray-600 max-w-3xl mx-auto leading-relaxed">
              Enter your income and number of dependents to get the
              <span className="text-blue-600 font-semibold"> best deduction </span>
              automatically
            </p>

            {/* Current state */}
            <div className="bg-blue-50 rounded-lg p-6 max-w-md mx-auto">
              <div className="space-y-3">
                <div className="flex justify-between items-center">
                  <span className="font-medium text-gray-700">Current income:</span>
                  <span className="text-2xl font-bold text-blue-600">
                    {income.toLocaleString()}
                  </span>
                </div>
                <div className="flex justify-between items-center">
                  <span className="font-medium text-gray-700">Dependents:</span>
                  <span className="text-xl font-semibold text-green-600">{dependentCount}</span>
                </div>
                <div className="flex justify-between items-center">
                  <span className="font-medium text-gray-700">Remaining limit:</span>
                  <span className="text-2xl font-bold text-orange-600">
                    {remainingLimit.toLocaleString()}
                  </span>
                </div>
              </div>
            </div>

            {/* CTA Buttons */}
            <div className="flex flex-col sm:flex-row gap-4 justify-center items-center pt-8">
              <Button
                size="lg"
                onClick={handleIncomeUpdate}
                className="bg-blue-600 hover:bg-blue-700 text-white px-8 py-6 text-lg font-semibold shadow-lg transition-all duration-200"
              >
                <TrendingUp className="w-5 h-5 mr-2" />
                Update income
                <ArrowRight className="w-5 h-5 ml-2" />
              </Button>
              <Button
                variant="outline"
                size="lg"
                onClick={handleDependentAdd}
                className="border-blue-300 text-blue-700 hover:bg-blue-50 px-8 py-6 text-lg font-semibold transition-all duration-200"
              >
                <Users className="w-5 h-5 mr-2" />
                Add dependent
              </Button>
              <Button
                size="lg"
                onClick={handleCalculate}
                className="bg-green-600 hover:bg-green-700 text-white px-8 py-6 text-lg font-semibold shadow-lg transition-all duration-200"
              >
                <Calculator className="w-5 h-5 mr-2" />
                Recalculate
              </Button>
            </div>
          </div>
        </div>
      </section>

      {/* Feature Cards */}
      <section className="py-20 px-6">
        <div className="container mx-auto">
          <div className="text-center mb-16">
            <h2 className="text-3xl md:text-4xl font-bold text-gray-900 mb-4">
              Why <span className="text-blue-600">automate</span> it?
            </h2>
            <p className="text-lg text-gray-600 max-w-2xl mx-auto">
              Complex deduction rules, handled for you
            </p>
          </div>

          <div className="grid md:grid-cols-2 lg:grid-cols-3 gap-8">
            {FEATURES.map(({ icon: Icon, accent, title, description, points }) => (
              <Card key={title} className="bg-white border border-gray-200 shadow-md hover:shadow-lg transition-shadow duration-200">
                <CardHeader className="text-center pb-4">
                  <div className={`mx-auto w-12 h-12 bg-${accent}-100 rounded-lg flex items-center justify-center mb-4`}>
                    <Icon className={`w-6 h-6 text-${accent}-600`} />
                  </div>
                  <CardTitle className="text-xl font-semibold text-gray-900">{title}</CardTitle>
                  <CardDescription className="text-gray-600">{description}</CardDescription>
                </CardHeader>
                <CardContent>
                  <ul className="space-y-2 text-sm text-gray-600">
                    {points.map((point) => (
                      <li key={point} className="flex items-center">
                        <div className={`w-2 h-2 bg-${accent}-500 rounded-full mr-3`}></div>
                        {point}
                      </li>
                    ))}
                  </ul>
                </CardContent>
              </Card>
            ))}
          </div>
        </div>
      </section>

      {/* Final CTA Section */}
      <section className="py-20 px-6 bg-white">
        <div className="container mx-auto">
          <Card className="bg-gradient-to-r from-blue-500/10 via-purple-500/10 to-pink-500/10 border-blue-200">
            <CardContent className="p-16 text-center">
              <h3 className="text-3xl md:text-4xl font-bold text-gray-900 mb-4">
                Start <span className="text-blue-600">optimizing</span> today
              </h3>
              <p className="text-lg text-gray-600 mb-8 max-w-2xl mx-auto">
                Finish your deduction planning in minutes
              </p>
              <div className="flex flex-col sm:flex-row gap-4 justify-center">
                <Button
                  size="lg"
                  onClick={handleCalculate}
                  className="bg-blue-600 hover:bg-blue-700 text-white px-12 py-6 text-xl font-semibold shadow-lg transition-all duration-200"
                >
                  <Calculator className="w-6 h-6 mr-2" />
                  Calculate for free
                  <ArrowRight className="w-6 h-6 ml-2" />
                </Button>
                <Button
                  variant="outline"
                  size="lg"
                  onClick={() => console.log('[Generated UI] Show detailed guide')}
                  className="border-blue-300 text-blue-700 hover:bg-blue-50 px-12 py-6 text-xl transition-all duration-200"
                >
                  Read the guide
                </Button>
              </div>
              <div className="mt-8 text-sm text-gray-500">
                This UI was generated automatically
              </div>
            </CardContent>
          </Card>
        </div>
      </section>
    </div>
  )
}
"""


def fallback_template() -> str:
    return FALLBACK_TEMPLATE
